from setuptools import setup, find_packages

setup(
    name='gfxmath',
    version='1.0.0',
    description='Rotation and transform kernel for 2D and 3D graphics',
    packages=find_packages(include=['gfxmath', 'gfxmath.*']),
    python_requires='>=3.11',
    install_requires=['numpy', 'scipy', 'pandas'],
    extras_require={'test': ['pytest']},
)
