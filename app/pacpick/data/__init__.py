"""Bundled data files for pacpick."""
