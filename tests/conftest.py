import os
import sys

# add root to import path so the top-level modules import without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
