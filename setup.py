"""Setup script for the issue tracker command line tools"""

from setuptools import setup, find_namespace_packages

setup(
    name="tracker-cli",
    version="1.0.0",
    packages=find_namespace_packages(include=["tracker_cli", "tracker_cli.*"]),
    install_requires=[
        "aiohttp>=3.8.0",
        "pyyaml>=6.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    author="Tracker CLI Team",
    description="Command line tools for the issue tracker",
    entry_points={
        "console_scripts": [
            "tracker=tracker_cli.main:main",
        ],
    },
)
