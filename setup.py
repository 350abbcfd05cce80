import re
from setuptools import setup


def get_meta(name):
    """Retrieve package metadata without importing the package"""
    with open("skdiveShape/__init__.py") as f:
        meta = re.search(r'^__{}__ = "([^"]*)"'.format(name), f.read(),
                         re.M)

    return(meta.group(1))


def readme():
    with open('README.rst') as f:
        lines = f.readlines()

    return("".join(lines))


def get_requirements():
    with open("requirements.txt") as f:
        reqs = f.read().splitlines()

    return(reqs)


REQUIREMENTS = get_requirements()
DEV_REQUIRES = ["ipython", "jupyter"]
TEST_REQUIRES = ["pytest"]
PACKAGES = ["skdiveShape", "skdiveShape.tests"]

setup(
    name="scikit-diveShape",
    version=get_meta("version"),
    python_requires=">=3.7",
    packages=PACKAGES,
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={
        "dev": DEV_REQUIRES,
        "test": TEST_REQUIRES,
        "docs": ["sphinx"]
    },
    # metadata for upload to PyPI
    author="Sebastian Luque",
    author_email="spluque@gmail.com",
    description="Dive shape analysis of time-depth recorder data",
    long_description=readme(),
    long_description_content_type="text/x-rst",
    license=get_meta("license"),
    keywords=["animal behaviour", "biology", "behavioural ecology",
              "diving", "diving behaviour", "dive shape"],
    classifiers=["Development Status :: 4 - Beta",
                 "Programming Language :: Python :: 3",
                 "Intended Audience :: Developers",
                 "Intended Audience :: Science/Research",
                 ("License :: OSI Approved :: "
                  "GNU Affero General Public License v3"),
                 "Topic :: Scientific/Engineering"]
)
