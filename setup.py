from setuptools import setup, find_packages

setup(
    name="pxshot",
    version="1.0.0",
    description="Python client for the Pxshot screenshot API",
    author="Pxshot",
    packages=find_packages(exclude=["tests*"]),
    install_requires=[
        "requests>=2.31.0",  # Blocking HTTP transport
        "aiohttp>=3.9.0",    # Async HTTP transport
        "pydantic>=2.0.0",   # Request/response models
        "pydantic-settings>=2.0.0",  # Environment configuration
        "python-dotenv>=1.0.0",  # .env support for pydantic-settings
        "loguru>=0.7.0",     # For enhanced logging
    ],
    python_requires=">=3.8",
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
        ]
    }
)
