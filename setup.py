from setuptools import setup
from shiftargs.const import VERSION_STR, DESCRIPTION

setup(
    name="shiftargs",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["shiftargs"],
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "shiftargs = shiftargs:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
