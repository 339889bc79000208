from codecs import open
from os import path

from setuptools import setup, find_packages

__version__ = '0.1.0'

here = path.abspath(path.dirname(__file__))
# Get the long description from README.md
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# get the dependencies and installs
with open(path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    reqs = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name='tagentropy',
    version=__version__,
    author='',
    author_email='',
    license='Apache License',
    packages=find_packages(include=['tagentropy', 'tagentropy.*']),
    package_data={'tagentropy': ['config/*.yml']},
    platforms=['all'],
    description=(
        'Tag entropy diversity evaluation of top-n recommendation lists'),
    long_description=long_description,
    long_description_content_type='text/markdown',
    keywords='recommender recommendation system evaluation diversity entropy tags',
    install_requires=reqs,
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['tagentropy=tagentropy.run:main']},
    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries'
    ]
)
