from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="countryidentity",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="ISO 3166-1 country codes and localized country names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/countryidentity",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'countryidentity.codes': ['data/*.csv', 'data/*.parquet'],
        'countryidentity.locales': ['data/*.yaml', 'data/langs/*.json'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "pyarrow>=10.0.0",
        "pyyaml>=5.4",
    ],
    extras_require={
        "build": ["pycountry>=22.1.10"],
        "dev": ["pytest>=7.0.0", "pycountry>=22.1.10"],
    },
)
