import re
import sys

if "test" in sys.argv:
    import codepoint
    # when test was successful, return 0 (hence not)
    sys.exit(not codepoint.test().wasSuccessful())

from setuptools import setup


kwds = {}
try:
    kwds['long_description'] = open('README.rst').read()
except IOError:
    pass

# Read version from codepoint/_encoder.py
pat = re.compile(r'^CODEPOINT_VERSION\s*=\s*"(\S+)"', re.M)
data = open('codepoint/_encoder.py').read()
kwds['version'] = pat.search(data).group(1)

setup(
    name = "codepoint",
    license = "PSF-2.0",
    classifiers = [
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
    description = "convert Unicode codepoints (U+XXXX) to UTF-8 bytes",
    packages = ["codepoint"],
    python_requires = ">=3.8",
    install_requires = ["bitarray>=3.4"],
    zip_safe = False,
    **kwds
)
