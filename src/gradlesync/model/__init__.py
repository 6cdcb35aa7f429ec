"""Model loading entrypoints."""

from gradlesync.model.loader import ModelLoader, archive_name_from_path
from gradlesync.model.plugins import PluginType, plugin_for_packaging
from gradlesync.model.xml_tree import XmlTreeReader

__all__ = ["ModelLoader", "PluginType", "XmlTreeReader", "archive_name_from_path", "plugin_for_packaging"]
