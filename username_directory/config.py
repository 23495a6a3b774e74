"""
Configuration management for username-directory
Resolves settings from environment variables, SSM Parameter Store, and local .env files
"""
import os
from typing import Any, Iterator, Optional
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, NoCredentialsError
from dotenv import load_dotenv


# Local development: pick up a .env file without overriding real env vars
load_dotenv(override=False)

ENV_PREFIX = 'USERNAME_DIRECTORY_'
TRUTHY_VALUES = ('true', '1', 'yes', 'on')


class Config:
    """
    Settings lookup, first hit wins:
    1. USERNAME_DIRECTORY_<KEY> environment variable
    2. <KEY> environment variable
    3. SSM Parameter Store under /username-directory/<environment>/<key>
    4. Caller-supplied default
    
    Only ambient settings (environment name, debug logging) live here.
    Directory behaviour is fixed in code and never read from the environment.
    """
    
    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/username-directory/{self.environment}'
        )
        self._ssm_client = None
    
    @property
    def ssm_client(self):
        """SSM client, created on first use; None when AWS is not reachable"""
        if self._ssm_client is None:
            try:
                self._ssm_client = boto3.client('ssm')
            except (NoCredentialsError, Exception):
                # Local development or tests without AWS credentials/region
                self._ssm_client = None
        return self._ssm_client
    
    @staticmethod
    def _env_names(key: str) -> Iterator[str]:
        name = key.upper().replace('-', '_')
        yield f"{ENV_PREFIX}{name}"
        yield name
    
    def get_parameter(self, key: str, default: Any = None) -> Any:
        for env_name in self._env_names(key):
            env_value = os.environ.get(env_name)
            if env_value is not None:
                return env_value
        
        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value
        
        return default
    
    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Cached Parameter Store lookup; a missing parameter yields None
        """
        if not self.ssm_client:
            return None
        
        parameter_name = f"{self.parameter_store_prefix}/{key}"
        
        try:
            response = self.ssm_client.get_parameter(Name=parameter_name)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except Exception as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None
    
    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in TRUTHY_VALUES
        return default
    
    @property
    def enable_debug_logging(self) -> bool:
        return self.get_bool_parameter('enable-debug-logging', False)


# Global configuration instance
config = Config()
