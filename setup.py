import re
from pathlib import Path

from setuptools import setup, find_packages


def _read_version():
    """Read PIP_VERSION inputs from src/histconsole/_version.py without importing it."""
    text = (Path(__file__).parent / "src" / "histconsole" / "_version.py").read_text(
        encoding="utf-8")
    parts = dict(re.findall(r'^(MAJOR|MINOR|PATCH|PHASE) = "?(\w+)"?', text, re.M))
    version = f"{parts['MAJOR']}.{parts['MINOR']}.{parts['PATCH']}"
    phase = parts.get("PHASE")
    if phase and phase != "None":
        version += {"alpha": "a0", "beta": "b0"}.get(phase, phase)
    return version


setup(
    name="histconsole",
    version=_read_version(),
    description="Keep a replayable history of console calls, with caller labels, for error reports",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "histconsole=histconsole.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
