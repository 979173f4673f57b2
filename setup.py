import re
from setuptools import find_packages, setup

__version__ ,= re.findall('__version__ = "(.*)"', open('kpz/__init__.py').read())


def parse_description():
    """
    Parse the description in the README file
    """
    from os.path import dirname, join, exists
    readme_fpath = join(dirname(__file__), 'README.md')
    # This breaks on pip install, so check that it exists.
    if exists(readme_fpath):
        with open(readme_fpath, 'r', encoding='utf-8') as f:
            text = f.read()
        return text
    return ''

setup(
    name = "kpz",
    version = __version__,
    packages=find_packages(exclude=['tests', 'benchmarks']),

    install_requires = ['lark>=1.2.1'],
    extras_require = {
        'test': ['pytest'],
        'bench': ['ubelt', 'timerit', 'pandas', 'numpy', 'seaborn', 'matplotlib'],
    },
    entry_points = {
        'console_scripts': ['kpz = kpz.repl:main'],
    },

    description = "An interactive calculator with variables and symbolic d/dx and int, built on Lark",
    keywords = "calculator expression parser derivative integral Lark LALR",
    long_description = parse_description(),
    long_description_content_type = 'text/markdown',
    license = 'MIT',
    python_requires = '>=3.8',
    classifiers = [
        # List of classifiers available at:
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        'Intended Audience :: Education',
        'Environment :: Console',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Utilities',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
        # Supported Python versions
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
