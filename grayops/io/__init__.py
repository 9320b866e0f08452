from .raster_io import read_image, write_image, encode_image, resolve_format

__all__ = ["read_image", "write_image", "encode_image", "resolve_format"]
