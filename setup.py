from setuptools import setup, find_packages

import watex

version = watex.__version__

setup(
    name='watex',
    version=version,
    description='A position-aware lexer for LaTeX math mode',
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages('.', exclude=['tests', 'tests.*']),
    install_requires=[],
    entry_points={
        'console_scripts': [
            'watex=watex.__main__:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',

        'License :: OSI Approved :: MIT License',

        'Operating System :: OS Independent',

        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing :: Markup :: LaTeX',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    python_requires='>=3.7',
)
