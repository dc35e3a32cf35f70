import logging

def setup_logging(debug=False, log_file=None):
    """
    Configure logging for the application.
    
    Args:
        debug: If True, set log level to DEBUG, otherwise INFO
        log_file: Optional path of a log file written alongside the console output
    """
    # Set root logger to a high level to suppress most messages
    logging.getLogger().setLevel(logging.WARNING)
    
    # Create our app logger
    app_logger = logging.getLogger('colorwave')
    level = logging.DEBUG if debug else logging.INFO
    app_logger.setLevel(level)
    
    # Repeated calls reconfigure instead of stacking handlers
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))
    
    # Set format
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    for handler in handlers:
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)
    
    return app_logger
