# Standard Library
import os
import sys


TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
# the test modules import these directly instead of an installed package
IMPORT_DIRS = (
	os.path.join("packages", "ringsketch"),
	os.path.join("tests", "fixtures"),
)


#============================================
def repo_root():
	"""Return the checkout holding pyproject.toml and packages/ringsketch."""
	root = os.path.dirname(TESTS_DIR)
	marker = os.path.join(root, "packages", "ringsketch", "ringsketch", "__init__.py")
	if not os.path.isfile(os.path.join(root, "pyproject.toml")) or not os.path.isfile(marker):
		raise RuntimeError(f"{root} does not look like a ringsketch checkout")
	return root


#============================================
def add_ringsketch_to_sys_path():
	root = repo_root()
	for relative_dir in IMPORT_DIRS:
		import_dir = os.path.join(root, relative_dir)
		if import_dir not in sys.path:
			sys.path.insert(0, import_dir)
	return root
