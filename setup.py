from setuptools import setup, find_packages

setup(
    name='emir',
    version='1.14.dev0',
    description='EMiR - Event Mappings in Reality, tag page generator',
    author='Achim Hoffmann',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='BSD',
    install_requires=['click', 'markupsafe'],
    extras_require={
        'test': ['pytest', 'lxml'],
    }
)
