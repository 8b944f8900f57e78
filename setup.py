from setuptools import setup
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='frostdkg',
    version='0.1.0.dev1',
    description='Threshold Schnorr distributed key generation with Feldman VSS',
    long_description=long_description,
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',

        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
    ],

    packages=['frostdkg'],
    python_requires='>=3.6',
    install_requires=[
        'py_ecc',
        'pycryptodome',
    ],
    extras_require={
        'test': [
            'flake8',
            'pytest',
        ],
    },

    entry_points={
        'console_scripts': [
            'frostdkg=frostdkg.__main__:main',
        ],
    },
)
