"""Setup configuration for photo-sorter package."""

from setuptools import find_packages, setup

# Read version from __version__.py
version = {}
with open("src/python/photo_sorter/__version__.py") as f:
    exec(f.read(), version)

# Read README
with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="photo-sorter",
    version=version["__version__"],
    description="Sort photos into camera model / year / quarter folders from their EXIF data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Photo Sorter Team",
    python_requires=">=3.11",
    package_dir={"": "src/python"},
    packages=find_packages(where="src/python", include=["photo_sorter", "photo_sorter.*"]),
    install_requires=[
        "pyyaml>=6.0.1",
        "pillow>=10.2.0",
        "exifread>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "photo-sorter=photo_sorter.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
    ],
)
