import codecs

from setuptools import find_packages
from setuptools import setup

TESTS_REQUIRE = [
    'coverage',
    'fudge',
    'nti.testing',
    'PyHamcrest',
    'zope.testing',
    'zope.testrunner',
]


def _read(fname):
    with codecs.open(fname, encoding='utf-8') as f:
        return f.read()


setup(
    name='pyramid_setlocale',
    version="0.0.1.dev0",
    description="Resolve a request locale from the URL, the Accept-Language header or an override.",
    long_description=(_read('README.rst') + '\n\n' + _read("CHANGES.rst")),
    license='Apache',
    keywords='pyramid zope i18n locale accept-language',
    classifiers=[
        'Framework :: Pyramid',
        'Framework :: Zope :: 3',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    zip_safe=True,
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    package_data={
        'pyramid_setlocale': ['*.zcml'],
    },
    tests_require=TESTS_REQUIRE,
    install_requires=[
        'pyramid',
        'setuptools',
        'zope.cachedescriptors',
        'zope.component',
        'zope.configuration',
        'zope.i18n',
        'zope.interface',
    ],
    extras_require={
        'test': TESTS_REQUIRE,
    },
    python_requires=">=3.8",
)
