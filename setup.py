"""Setup script for conslist."""
from setuptools import setup, find_packages  # type: ignore
import conslist

setup(
    name='conslist',
    version=conslist.version,
    description='An immutable cons list that counts its length in constant stack space',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
    ],
    keywords='cons list tail-call accumulator',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.10',
    install_requires=['typing-extensions>=4'],
    extras_require={
        'test': ['coverage>=6.4.4', 'hypothesis>=6', 'pytest'],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
