"""
Acceptera
=========

HTTP `Accept` header parsing and content type negotiation.
"""
from setuptools import setup, find_packages

extras_require = {
}

setup(
    name='acceptera',
    version='0.1.0',
    url='https://github.com/bwhmather/acceptera',
    license='BSD',
    author='Ben Mather',
    author_email='bwhmather@bwhmather.com',
    description='HTTP Accept header parsing and content negotiation',
    long_description=__doc__,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    platforms='any',
    install_requires=[
        'werkzeug >= 2.0',
        'python-mimeparse >= 2.0',
    ],
    extras_require=extras_require,
    packages=find_packages(),
    include_package_data=True,
)
