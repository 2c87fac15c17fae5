from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="isoidentity",
    version="0.1.0",
    author="Peter Cotton",
    author_email="",
    description="Canonical ISO code resolution: languages, countries, currencies, scripts, locales",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/isoidentity",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'isoidentity': ['*/data/*.yaml', '*/data/*.py'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "rapidfuzz>=2.0.0",
        "pyarrow>=10.0.0",
        "pyyaml>=5.4",
        "pycountry>=22.1.10",
        "country_converter>=1.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
