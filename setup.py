from setuptools import setup, find_packages


__version__ = '1.0.0'

with open("README.md", "r") as fh:
    long_desc = fh.read()


setup(
    name='ballot',
    version=__version__,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        "coloredlogs>=15.0.1",
        "pynacl>=1.5.0",
    ],
    zip_safe=False,
    description="In-memory ballot with delegated voting",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.6.5',
)
