'''
Utilities for internal use
'''


import os



def find_files(directory):
    '''Traverse file tree in alphabetical order (top down) and return file paths'''
    for root, dirs, files in os.walk(directory, followlinks=True, topdown=True):
        dirs.sort()  # ensure alphabetical traversal
        for filename in sorted(files):
            yield os.path.abspath(os.path.join(root, filename))



def make_target_directory(output_filename):
    '''Make sure that directory for this file exists'''
    target = os.path.dirname(output_filename)
    if target:
        os.makedirs(target, exist_ok=True)



def add_extension(filename, extension):
    '''Append extension to filename unless it is already there'''
    extension = '.' + extension.lstrip('.')
    if filename.lower().endswith(extension.lower()):
        return filename
    return filename + extension



def size_megabytes(filename):
    '''File size in whole binary megabytes (rounded down)'''
    return os.path.getsize(filename) // 1024 // 1024



def value(string_or_list):
    '''
    Get string value from a variable that might contain string or list of
    strings
    '''
    if isinstance(string_or_list, str):
        result = string_or_list
    elif string_or_list is None or len(string_or_list) == 0:
        result = ''
    elif len(string_or_list) == 1:
        result = str(string_or_list[0])
    else:
        result = ', '.join(str(item) for item in string_or_list)
    return result
