from setuptools import find_packages, setup

setup(
    name='regatta-course',
    version='1.0.0',
    packages=find_packages(exclude=['test', 'scripts']),
    install_requires=[
        'setuptools',
        'numpy',
        'shapely>=2.0',
        'pydantic>=2.0',
    ],
    python_requires='>=3.10',
    zip_safe=True,
    maintainer='Marcus Kornmann',
    maintainer_email='marcus.kornmann@sailingteam.tu-darmstadt.de',
    description='Course geometry and performance vectors for a windward regatta leg',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
        'plot': [
            'matplotlib',
        ],
    },
    entry_points={
        'console_scripts': [
            'regatta-course = regatta_course.cli:main',
        ],
    },
)
