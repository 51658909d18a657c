#!/usr/bin/env python
from setuptools import find_packages, setup

VERSION = __import__("assetpath").get_version()
INSTALL_REQUIREMENTS = ["Django>=4.2", "structlog"]
SCRIPTS = ["manage.py"]
DESCRIPTION = "Template tag resolving asset URLs for posts and pages"
CLASSIFIERS = """\
Environment :: Web Environment
Framework :: Django
Programming Language :: Python
Programming Language :: Python :: 3
""".splitlines()

with open("README.md", "r") as f:
    LONG_DESCRIPTION = f.read()


setup(
    name="django-asset-path",
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["assetpath", "assetpath.*"]),
    include_package_data=True,
    scripts=SCRIPTS,
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={"test": ["pytest", "pytest-django"]},
    python_requires=">=3.9",
    classifiers=CLASSIFIERS,
)
