# feedclean/io/__init__.py
from .load import group_records, load_json, load_path

__all__ = ["group_records", "load_json", "load_path"]
