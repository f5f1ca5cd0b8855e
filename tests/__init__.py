# This file makes tests a Python package
