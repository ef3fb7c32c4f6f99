"""Setup script for hashtool."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Return the long description, if a README is present."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="hashtool",
    version="1.0.0",
    description="Print string or file checksums (MD5, SHA-256, BLAKE3).",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["hashtool", "hashtool.*"]),
    install_requires=[
        "blake3>=0.4",
        "click>=8.2",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "hash=hashtool.__main__:main",
        ],
    },
)
