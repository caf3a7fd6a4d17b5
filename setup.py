"""Setup configuration for Storefront Catalog package."""

from setuptools import setup, find_namespace_packages

setup(
    name="storefront-catalog",
    version="1.0.0",
    description="Storefront product catalog API with URL filter/sort query codec",
    author="",
    author_email="",
    packages=find_namespace_packages(include=["api*", "config*", "src*", "scripts*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "duckdb>=1.0.0",
        "pandas>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "httpx>=0.26.0",
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "storefront-seed=scripts.seed_catalog:main",
        ],
    },
)
