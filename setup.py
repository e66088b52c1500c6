#!/usr/bin/env python
from setuptools import setup
setup(
    name='paymentobjects',
    version='1.0',
    description='an Object RESTational Model for payment APIs',
    author='Six Apart Ltd.',
    author_email='python@sixapart.com',

    packages=['paymentobjects'],
    provides=['paymentobjects'],
    python_requires='>=3.7',
    install_requires=['simplejson>=2.0.0', 'httplib2>=0.4.0'],
    extras_require={
        'test': ['mock', 'pytest'],
    },
)
