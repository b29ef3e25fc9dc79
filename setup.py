from setuptools import Extension, find_packages, setup
from Cython.Build import cythonize


COMPILED_MODULES = (
    "pytarscan.pytarscan",
    "pytarscan.cli.cli_parser",
    "pytarscan.core.blocks",
    "pytarscan.core.models",
    "pytarscan.core.scanner",
    "pytarscan.core.transfer",
    "pytarscan.filters.name_filters",
    "pytarscan.utils.common",
)


setup(
    name="pytarscan",
    version="0.1.0",
    description="List and extract regular files from ustar archives",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=("pytarscan.tests*",)),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pytarscan=pytarscan.cli.cli_parser:cli_parser",
        ],
    },
    ext_modules=cythonize(
        [
            Extension(name, [f"src/{name.replace('.', '/')}.py"])
            for name in COMPILED_MODULES
        ],
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
            "initializedcheck": False,
            "cdivision": True,
            # annotations are documentation here, not C types
            "annotation_typing": False,
        },
    ),
)
