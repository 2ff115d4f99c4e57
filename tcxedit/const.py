import os


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

ROOT_TAG = "TrainingCenterDatabase"

# Environment-backed defaults, overridable through EditorSettings
DEFAULT_LOG_LEVEL = os.getenv('TCXEDIT_LOG_LEVEL', 'INFO')
DEFAULT_LOG_DIR = os.getenv('TCXEDIT_LOG_DIR')
DEFAULT_TRIMMED_SUFFIX = '_trimmed'

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
