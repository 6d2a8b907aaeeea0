# Sample jenkinshook configuration, run with:
#   pecan serve etc/config.py

server = {
    'port': '20002',
    'host': '0.0.0.0'
}

app = {
    'root': 'jenkinshook.controllers.root.RootController',
    'modules': ['jenkinshook'],
    'debug': False,
}

services = ['stash', 'jenkins']

admin = {
    'name': 'admin',
}

policy = {
    'policy_file': '/etc/jenkinshook/policy.yaml',
}

stash = {
    'base_url': 'https://stash.example.com/stash',
    'ssh': {
        'enabled': True,
        'base_url': 'ssh://git@stash.example.com:7999',
    },
    'hooks': [
        {'project': 'TEST',
         'slug': 'test',
         'jenkinsBase': 'https://jenkins.example.com/jenkins',
         'cloneType': 'ssh',
         'cloneUrl': None,
         'ignoreCerts': False,
         'omitHashCode': False,
         'omitBranchName': False},
    ],
}

jenkins = {
    'timeout': 10,
    # 'user': 'jenkins',
    # 'password': 'api_token',
}

logging = {
    'loggers': {
        'root': {'level': 'INFO', 'handlers': ['console']},
        'jenkinshook': {'level': 'DEBUG', 'handlers': ['console']},
        'py.warnings': {'handlers': ['console']},
        '__force_dict__': True
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        }
    },
    'formatters': {
        'simple': {
            'format': ('%(asctime)s %(levelname)-5.5s [%(name)s]'
                       '[%(threadName)s] %(message)s')
        }
    }
}
