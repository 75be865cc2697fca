import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

try:
    # Get the long description from the README file
    with open(os.path.join(here, "readme.md"), encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    # This exception is a problem when launching tox
    # Could not find a better workaround
    # Forcing the inclusion of the readme in the archive seems overkill
    long_description = ""

setup(
    name="runwaycast",
    version="0.1.0",
    license="MIT",
    description="Landing runway prediction from live ADS-B state vectors "
    "at Frankfurt airport",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": ["runwaycast=runwaycast.console:main"],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"runwaycast": ["runwaycast.conf", "py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.18",
        "pandas>=1.0.0",
        "httpx",
        "rich",
        "appdirs",  # proper configuration directories
        "python-dotenv",
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
        "dev": [
            "pytest",
            "mypy",
            "ruff",
            "pre-commit",
        ]
    },
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 3 - Alpha",
        # Indicate who your project is intended for
        "Intended Audience :: Information Technology",
        "Intended Audience :: Science/Research",
        # Indicate relevant topics
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Software Development :: Libraries",
        # Pick your license as you wish (should match "license" above)
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Typing :: Typed",
    ],
)
