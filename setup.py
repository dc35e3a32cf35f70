from setuptools import setup, find_packages

setup(
    name="color_wave",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["color_wave_cli"],
    install_requires=[
        "numpy",
        "opencv-python",
        "coloraide",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'color-wave=color_wave_cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Procedural color wave rendered through HSLuv and Okhsl",
)
