# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_validate",
    version="0.1.2",
    description="Validate that IP addresses belong to known web robots (forward-confirmed reverse DNS)",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "dnspython>=2.4",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "robots-validate=robots_validate.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
