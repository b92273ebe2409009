"""Setup configuration for image-tag-policy package.

This module configures the package for distribution, including dependencies,
entry points, and metadata. It reads requirements from requirements.txt if available,
otherwise uses a default set of requirements.

Example:
    To install the package:
        $ pip install .

    To build the package:
        $ python setup.py sdist bdist_wheel

Attributes:
    requirements_file (Path): Path to requirements.txt file
    requirements (list): List of package dependencies
"""

from pathlib import Path
from setuptools import setup, find_packages

requirements_file = Path("requirements.txt")
if requirements_file.exists():
    with open(requirements_file, encoding="utf-8") as f:
        requirements = f.read().splitlines()
else:
    # Default requirements if file is not found
    requirements = [
        "semver>=3.0.0",
        "semantic_version>=2.10.0",
        "PyYAML>=6.0",
        "dpath>=2.1.0",
    ]

setup(
    name="image_tag_policy",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "image-tag-policy=image_tag_policy.cli:main",
        ],
    },
    python_requires=">=3.9",
    description="Match image tags against glob and semver patterns and rank them newest first",
)
