# -*- coding: utf-8 -*-
import setuptools

import multigeneric


setuptools.setup(
    name="multigeneric",
    version=multigeneric.__version__,
    author=multigeneric.__author__,
    description="Multiple-dispatch generic functions with super calls.",
    license=multigeneric.__license__,
    keywords="multiple dispatch generic function method",
    packages=setuptools.find_packages(),
    long_description=open('README.rst').read(),
    long_description_content_type="text/x-rst",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: BSD License",
    ],
)
