# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Setup configuration for proxy-auth package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="proxy-auth",
    version="0.1.0",
    author="proxy-auth contributors",
    description="Identity provider adapters (Ku) for an OAuth2 authenticating reverse proxy",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["proxy_auth", "proxy_auth.*", "proxy_logging", "proxy_logging.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",  # For userinfo and token validation requests
        "pydantic>=2.4.0",  # For provider configuration and userinfo decoding
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
    },
)
