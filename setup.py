from setuptools import setup

# Extract the expectpy version
version = open('expectpy/__init__.py').readlines()
version = [v for v in version if '__version__' in v][0].strip()
version = version.split('"')[-2]
assert len(version.split('.')) == 3, f'Invalid parsed version "{version}"'

setup(
    name='expectation_groups',
    version=version,
    description='Test expectation grouping report',
    long_description='Groups test-expectation keys by parent path and reports how many keys each group holds',
    license_expression='MIT',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Testing',
        'Programming Language :: Python :: 3',
    ],
    keywords=[
        'test262',
        'expectations',
        'report',
    ],
    packages=[
        'expectpy'
    ],
    py_modules=[
        'expectation_groups'
    ],
    install_requires=[
        'click>=8.2.0,<9.0.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'expectation-groups=expectation_groups:cli'
        ]
    }
)
