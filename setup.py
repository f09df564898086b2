import setuptools

with open("README.md") as fh:
    long_description = fh.read()

setuptools.setup(
    name="fontmeter",
    version="0.1.0",
    author="Shay Hill",
    author_email="shay_public@hotmail.com",
    description="Character widths at any font size, scaled from one baseline.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    package_data={"fontmeter": ["py.typed"]},
    packages=setuptools.find_packages("src"),
    install_requires=["fonttools", "paragraphs", "typing_extensions"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
