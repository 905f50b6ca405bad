from setuptools import find_packages, setup

version='0.1'

try:
    long_description = open("README.txt").read()
except OSError:
    long_description = ''

setup(name='trac-GravatarImagePlugin',
      version=version,
      description="Renders Gravatar images in Trac",
      long_description=long_description,
      keywords='trac plugin gravatar',
      license="BSD",
      packages=find_packages(exclude=['ez_setup', 'examples', 'tests*']),
      include_package_data=True,
      zip_safe=False,
      install_requires=['Trac>=1.6', 'Genshi>=0.7'],
      extras_require={'test': ['pytest']},
      entry_points = """
      [trac.plugins]
      gravatarimage = gravatarimage
      gravatarimage.providers = gravatarimage.providers
      gravatarimage.macro = gravatarimage.macro
      """,
      )
