"""
Setup file.
"""

import os

from setuptools import setup

URL = "https://github.com/fbxpack/fbxpack"
KEYWORDS = "fbx sdk vcpkg cmake ci build packaging universal-binary"
HERE = os.path.dirname(os.path.abspath(__file__))


if __name__ == "__main__":
    setup(
        keywords=KEYWORDS,
        url=URL,
        include_package_data=True)
