"""Setup file for development installation."""

from setuptools import setup, find_namespace_packages

setup(
    name="memory-client",
    version="0.1.0",
    description="Async client for the memory server chat API",
    packages=find_namespace_packages(where="src", include=["memory_client*"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.0",
        "structlog",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio>=0.21",
            "fastapi",
        ],
    },
)
