DEFAULT_FILL = ' '
LINE_BREAK_PATTERN = r'\r\n|\r|\n'
