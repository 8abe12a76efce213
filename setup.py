#!/usr/bin/env python
"""
SeisPos: Geodetic positioning for seismology in Python
"""

import os
from setuptools import setup, find_packages



def readme():
	with open("README.md", "r") as f:
		return f.read()


here = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(os.path.join(here, 'seispos', "__version__.py")) as f:
	exec(f.read(), about)


pkg_metadata = dict(
		name="seispos",
		version=about["__version__"],
		description="Destination points and back azimuths on the reference ellipsoid",
		long_description=readme(),
		long_description_content_type="text/markdown",
		license="MIT",
		packages=find_packages(exclude=["tests", "tests.*"]),
		python_requires=">=3.6",
		keywords="Geodesy, Vincenty, Seismology, Epicenter, Station, Azimuth",
		install_requires=['numpy>=1.16.0'],
		extras_require={
			"test": ['pytest', 'obspy>=1.1.0'],
			},
		classifiers=["License :: OSI Approved :: MIT License",
					 "Programming Language :: Python :: 3"]
		)

setup(**pkg_metadata)
