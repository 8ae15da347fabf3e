# Package: sortkit
#
# Four textbook comparison sorts over random fixed-width integers,
# plus the generator, renderer and measurement helpers around them.

from sortkit.config import VERSION as __version__
