MAX_VALIDATOR_COUNT = 2**22  # validators


def generate_config(*,
                    max_validator_count=MAX_VALIDATOR_COUNT):
    return {
        'max_validator_count': max_validator_count,
    }


DEFAULT_CONFIG = generate_config()
