import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="handheld-thumbnailer",
    version="0.1.0",
    description="Thumbnails from the icons of Nintendo DS and 3DS files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    scripts=[
        'scripts/handheld-thumbnailer.py',
    ],
    install_requires=[
        'bitstring',
        'pillow',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: OS Independent",
    ],
)
