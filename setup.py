from pathlib import Path
from setuptools import find_packages, setup

ROOT = Path(__file__).parent


def _version() -> str:
    """Read __version__ from the package without importing it."""
    init = ROOT / "src" / "minicat" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/minicat/__init__.py")


setup(
    name="minicat",
    version=_version(),
    description="Concatenate a project's sources into one minified Markdown document",
    author="GAHEOS",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["minicat", "minicat.*"]),
    install_requires=[
        "tiktoken>=0.7",
        "pathspec>=0.12",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["minicat=minicat.cli:main"],
    },
)
