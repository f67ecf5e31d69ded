from .gpx_loader import parse_gpx, load_gpx_file, load_gpx_files

__all__ = ['parse_gpx', 'load_gpx_file', 'load_gpx_files']
