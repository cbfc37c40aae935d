from setuptools import setup, find_packages

# Test dependencies kept together with install dependencies - pytest is lightweight.
setup(name="cmhomog", version=0.1, description="Homogeneous coordinates on the Riemann sphere",
      packages=find_packages(include=['cmhomog', 'cmhomog.*']),
      install_requires=['numpy', 'pyyaml', 'pytest'], python_requires='>=3.7')
