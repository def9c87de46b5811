import os

# Get the base directory of the package (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Web quiz assets ship inside the package
TEMPLATES_DIR = os.path.join(BASE_DIR, 'templates')
STATIC_DIR = os.path.join(BASE_DIR, 'static')

__version__ = "0.1.0"
