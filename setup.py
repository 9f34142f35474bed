"""RatPoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import ratpoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='ratpoly',
    version=ratpoly.__version__,
    description='RatPoly -- Exact Rational Polynomial Arithmetic in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomials', 'rational numbers', 'exact arithmetic',
              'computer algebra', 'calculus', 'polynomial division'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=ratpoly.__license__,
    packages=['ratpoly'],
    platforms=['any'],
    install_requires=['gmpy2', 'numpy'],
    python_requires='>=3.8'
)
