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
    long_description = "Wall line snapping helpers for floor plan tracing"

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
    name='floorplan-snapping',
    version='1.0.0',
    author='Floor Plan Optimization Team',
    author_email='support@floorplanoptimizer.com',
    description='Snap traced floor plan vertices and edges to detected wall lines',
    long_description=long_description,
    long_description_content_type='text/markdown',
    py_modules=[
        'config',
        'models',
        'snapping_helper',
        'utils',
        'vertex_snapper',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Image Processing',
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
    zip_safe=False,
)
