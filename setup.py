# type: ignore
import os

import setuptools

SOURCE_DIR = os.path.dirname(os.path.abspath(__file__))

try:
    with open(os.path.join(SOURCE_DIR, "README.md")) as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "**SETUP: README NOT FOUND**"

install_requires = [
    # These specifiers are flexible so capstanignore can live in the same
    # virtualenv as the packaging tooling that calls it.
    "attrs>=21.3",
    "boltons~=21.0",
    "click-option-group~=0.5",
    "click~=8.1",
]

extras_require = {"test": ["pytest>=6.2"]}

setuptools.setup(
    name="capstanignore",
    version="0.1.0",
    description="Decides which files a package build leaves out, from .capstanignore glob patterns.",
    install_requires=install_requires,
    extras_require=extras_require,
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={"console_scripts": ["capstanignore=capstanignore.__main__:main"]},
    packages=setuptools.find_packages(include=["capstanignore", "capstanignore.*"]),
    classifiers=[
        "Environment :: Console",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Build Tools",
    ],
    python_requires=">=3.7",
    zip_safe=False,
)
