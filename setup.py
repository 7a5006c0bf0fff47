from setuptools import setup
from Cython.Build import cythonize

# python setup.py build_ext --inplace
setup(
    name='ring-search',
    version='1.0.1',
    description='Binary search of a key on a consistent hashing continuum',
    py_modules=['binary_search', 'continuum'],
    ext_modules=cythonize(
        "binary_search.py",
        compiler_directives={'language_level': 3, 'annotation_typing': False},
    ),
    python_requires='>=3.8',
    extras_require={'test': ['pytest']},
    zip_safe=False,
)
