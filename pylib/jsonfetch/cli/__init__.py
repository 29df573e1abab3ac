'''Command-line entry point.'''
