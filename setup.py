import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dupindexer",
    version="0.1.0",
    author="tinker495",
    author_email="wjdrbtjr495@gmail.com",
    description="Dense first-occurrence indices for deduplicated values",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/tinker495/dupindexer",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "jax>=0.4.0",
        "chex>=0.1.0",
        "tabulate>=0.9.0",
        "numpy>=1.21.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.9",
)
