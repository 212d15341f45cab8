from .options import EncodeOptions, load_encode_options

__all__ = ["EncodeOptions", "load_encode_options"]
