import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="illumina_coordinates",
    version="0.1.0",
    description="A package and executable for parsing Illumina sequence identifiers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "pyyaml"
        ],
    python_requires=">=3.8",
    packages=setuptools.find_packages(exclude=["test_*"]),
    package_data={"illumina_coordinates": ["data/*.yml"]},
    include_package_data=True,
    entry_points={'console_scripts': [
        'illumina-coordinates=illumina_coordinates.__main__:main',
    ]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
