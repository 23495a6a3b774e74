"""
Unit tests for structured logging
"""
import json
import pytest

from username_directory.exceptions import EmptyCounterError, InvalidArgumentError
from username_directory.decorators import log_operation
from username_directory.logger import DirectoryLogger, directory_logger


def read_entries(capsys):
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestDirectoryLogger:
    
    def test_info_is_structured_json(self, capsys):
        logger = DirectoryLogger('unit-test')
        
        logger.info("hello", username='alice')
        
        entry = read_entries(capsys)[0]
        assert entry['level'] == 'INFO'
        assert entry['service'] == 'unit-test'
        assert entry['environment'] == 'test'
        assert entry['message'] == 'hello'
        assert entry['username'] == 'alice'
        assert 'timestamp' in entry
    
    def test_debug_suppressed_unless_enabled(self, capsys):
        logger = DirectoryLogger('unit-test')
        
        logger.debug("hidden")
        assert read_entries(capsys) == []
        
        logger.debug_enabled = True
        logger.debug("shown")
        assert read_entries(capsys)[0]['message'] == 'shown'
    
    def test_default_service_name(self, capsys):
        DirectoryLogger().info("hello")
        
        assert read_entries(capsys)[0]['service'] == 'directory-service'
    
    def test_service_operation(self, capsys):
        logger = DirectoryLogger('unit-test')
        
        logger.log_service_operation('register_username', entity_type='username', entity_id='alice', user_id='U1')
        
        entry = read_entries(capsys)[0]
        assert entry['message'] == 'Service operation: register_username'
        assert entry['entity_id'] == 'alice'
        assert entry['user_id'] == 'U1'


class TestServiceLogging:
    """Log lines produced by the directory itself"""
    
    def test_registration_logs(self, directory, capsys):
        directory.register_username('alice', 'U1')
        directory.register_username('alice', 'U2')
        
        entries = read_entries(capsys)
        assert entries[0]['operation'] == 'register_username'
        assert entries[1]['message'] == 'Username already registered'
        assert entries[1]['rejected_user_id'] == 'U2'
    
    def test_empty_counter_warns(self, directory, capsys):
        with pytest.raises(EmptyCounterError):
            directory.get_most_attempted()
        
        entries = read_entries(capsys)
        assert entries[-1]['level'] == 'WARNING'
    
    def test_rejected_check_is_logged(self, directory, capsys):
        with pytest.raises(InvalidArgumentError):
            directory.check_availability('')
        
        entry = read_entries(capsys)[-1]
        assert entry['operation'] == 'check_availability'
        assert entry['error_code'] == 'INVALID_ARGUMENT'


class Greeter:
    """Minimal target for the operation decorator"""
    
    @log_operation(subject_field='name')
    def greet(self, name):
        return f"hi {name}"
    
    @log_operation('pair_up')
    def pair(self, left, right):
        return (left, right)


class TestLogOperation:
    """Debug entries written by the operation decorator"""
    
    @pytest.fixture(autouse=True)
    def enable_debug(self, monkeypatch):
        monkeypatch.setattr(directory_logger, 'debug_enabled', True)
    
    def test_subject_field_names_first_argument(self, capsys):
        Greeter().greet('ann')
        
        entry = read_entries(capsys)[0]
        assert entry['operation'] == 'greet'
        assert entry['name'] == 'ann'
        assert 'username' not in entry
        assert entry['result'] == 'hi ann'
    
    def test_positional_arguments_logged_generically(self, capsys):
        Greeter().pair('a', 'b')
        
        entry = read_entries(capsys)[0]
        assert entry['operation'] == 'pair_up'
        assert entry['args'] == ['a', 'b']
        assert 'username' not in entry
    
    def test_directory_checks_log_username(self, directory, capsys):
        directory.check_availability('alice')
        
        entry = read_entries(capsys)[0]
        assert entry['operation'] == 'check_availability'
        assert entry['username'] == 'alice'
        assert entry['result'] is True
