import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dgkernel",
    version="0.1",
    description="Fixed-dimension digital points and vectors over numeric scalar types",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["dgkernel", "dgkernel.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression>=5.0",
        "numpy>=1.24",
        "numpydoc_decorator",
        "pyyaml",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)
