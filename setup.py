from setuptools import setup, find_packages

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='karyoviz',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='SVG karyotype rendering with hit-density and Giesma band overlays.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'pandas>=1.3.0', 'numpy>=1.20.0', 'matplotlib>=3.3.0', 'PyYAML>=5.4.0', 'loguru>=0.5.3'
    ],
    extras_require={'test': ['pytest>=7.0']},
    entry_points={'console_scripts': ['karyoviz = karyoviz.main:main']},
    package_data={'karyoviz': ['config/karyoviz.yaml']},
    include_package_data=True,
    python_requires='>=3.8',
)
