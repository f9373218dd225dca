import os
import re

from setuptools import setup


def get_version():
    module_init = 'chromaslide/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                     open(module_init).read()).group(1)


setup(name='chromaslide',
      version=get_version(),
      description='Channel and blending models for multi-channel slide microscopy viewers',
      license='LGPL',
      packages=['chromaslide'],
      install_requires=['colorlog', 'frozendict', 'numpy', 'ruamel.yaml',
                        'traitlets', 'wrapt'],
      extras_require={'test': ['pytest']},
      keywords='microscopy dicom slide channel blending',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Scientific/Engineering :: Medical Science Apps.'
      ])
