"""Configure test suite environment"""
import os
import sys

# Make the src package importable without installing the project
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)
