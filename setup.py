"""
setup.py - Package Installation Configuration
==============================================
"""

from setuptools import setup
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
if readme_file.exists():
    long_description = readme_file.read_text()
else:
    long_description = "Largest connected, attractiveness-closed trip plan in a road tree"

# Read requirements
requirements_file = Path(__file__).parent / "requirements.txt"
if requirements_file.exists():
    with open(requirements_file) as f:
        requirements = [line.strip() for line in f
                       if line.strip() and not line.startswith('#')]
else:
    requirements = [
        'numpy>=1.21.0',
        'PyYAML>=5.4',
    ]

setup(
    name='tree-trip-planner',
    version='1.0.0',
    author='Tree Trip Planner Team',
    description='Backtracking search for the largest attractiveness-closed trip plan in a tree',
    long_description=long_description,
    long_description_content_type='text/markdown',
    py_modules=[
        'attractiveness_pool',
        'config',
        'main',
        'models',
        'path_finder',
        'search_engine',
        'selection_set',
        'tree_builder',
        'tree_generators',
        'utils',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require={
        'dev': [
            'pytest>=6.2.0',
            'black>=21.6b0',
            'flake8>=3.9.0',
            'mypy>=0.910',
            'coverage>=5.5',
        ],
    },
    entry_points={
        'console_scripts': [
            'tree-trip=main:main',
        ],
    },
    zip_safe=False,
)
