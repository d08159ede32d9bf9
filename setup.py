from setuptools import setup, find_packages


setup(
    name='musicsync',
    version='0.1.0',
    description='Copy or transcode music files into a library organized by tags',
    license='Apache',
    platforms='any',
    entry_points={
        'console_scripts': [
            'musicsync=musicsync.app:run',
        ],
    },
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={
        'musicsync': ['*.schema.json'],
    },
    include_package_data=True,
    install_requires=[
        'mutagen',
        'jsonschema',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.11',
    zip_safe=False,
)
