import setuptools

with open("README.md") as fh:
    long_description = fh.read()

setuptools.setup(
    name="element_core",
    version="0.1.0",
    author="Shay Hill",
    author_email="shay_public@hotmail.com",
    description="Rectangular diagram elements with resize handles and connection points.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    package_data={"element_core": ["py.typed"]},
    packages=setuptools.find_packages("src"),
    install_requires=["lxml", "svg_path_data", "paragraphs", "typing_extensions"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
