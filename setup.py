"""Package setup for smartschool_client."""

from setuptools import setup, find_packages

setup(
    name="smartschool-client",
    version="0.1.0",
    description="Client library for the JSON APIs of a Smartschool instance",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "smartschool-client=smartschool_client.cli:main",
        ],
    },
)
