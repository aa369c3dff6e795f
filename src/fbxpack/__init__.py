"""fbxpack - packaged native builds of the FBX glTF converter CLI."""

__version__ = "0.1.0"
