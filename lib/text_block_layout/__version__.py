__title__ = 'text_block_layout'
__description__ = 'Compose rectangular blocks of multi-line text into larger layouts'
__version__ = '0.1.0'
__author__ = 'Doug Skrypa'
