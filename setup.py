"""Setup script for asyncapi_exporter"""

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

setup(
    name="asyncapi-exporter",
    version="1.0.0",
    author="kcenon",
    author_email="kcenon@naver.com",
    description="Export AsyncAPI documents from Solace Event Portal, with a small leveled logger",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/kcenon/asyncapi_exporter",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "docs"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=["requests>=2.28.0"],
    extras_require={
        "dev": ["pytest>=7.0.0", "pytest-cov>=4.0.0", "black>=23.0.0"],
    },
    entry_points={
        "console_scripts": [
            "asyncapi-export=asyncapi_exporter.cli.main:run",
        ],
    },
)
