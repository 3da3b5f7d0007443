import setuptools


def read_requirements(file):
    with open(file) as f:
        return f.read().splitlines()


with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

requirements = read_requirements("requirements.txt")

setuptools.setup(
    name='nostrcodec',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.0.1',
    description='Bech32 encoding for nostr keys.',
    keywords=['nostr', 'bech32', 'nip19'],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
    ],
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    license='MIT license',
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={
        'console_scripts': [
            'nostrcodec=nostrcodec.cli:app',
        ]
    },
)
