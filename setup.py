# setup.py
from setuptools import setup, find_packages, Extension
from Cython.Build import cythonize
import os

# The argument binder runs on every call; compile it when a C compiler is around.
bind_path = os.path.join("kappa", "evaluation", "bind.py")

setup(
    name="kappa",
    version="0.1.0",
    description="Function objects, attribute descriptors and method binding for a dynamic-language runtime",
    packages=find_packages(include=["kappa", "kappa.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    ext_modules=cythonize(
        Extension(
            name="kappa.evaluation.bind",  # module path for import
            sources=[bind_path],
            optional=True,
        ),
        compiler_directives={'language_level': "3", "annotation_typing": False},
    ),
    zip_safe=False,
)
