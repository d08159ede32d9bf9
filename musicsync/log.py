'''
Logging setup for command line runs
'''


import logging


LOG_FORMAT = '%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s'



def setup_logging(filename=None, verbose=False, name='musicsync'):
    '''
    Create the application logger.

    Records go to filename (or to stderr if no filename is given). Handlers
    serialize writes from concurrent worker threads.
    '''
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if filename:
        handler = logging.FileHandler(filename, mode='w', encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
