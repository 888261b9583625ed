from setuptools import setup, find_packages

setup(
    name="signature-to-image",
    version="0.1.0",
    description="Render Signature Pad JSON strokes or typed names into signature images",
    author="Your Name",
    author_email="horaja@cs.cmu.edu",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pillow>=8.0.0",
        "pyyaml>=5.4.0",
        "tqdm>=4.62.0",
        "matplotlib>=3.4.0",
    ],
    extras_require={
        "dev": ["pytest>=6.2.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
