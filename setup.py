
from setuptools import setup, find_packages
import os

# Read version
with open(os.path.join('dialectforge', 'VERSION'), 'r') as f:
    version = f.read().strip()

setup(
    name='dialectforge',
    version=version,
    packages=find_packages(include=['dialectforge', 'dialectforge.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'sqlparse>=0.4.4',
        'sqlalchemy>=2.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        'console_scripts': [
            'dialectforge=dialectforge.main:main',
        ],
    },
    package_data={
        'dialectforge': ['VERSION'],
    },
)
