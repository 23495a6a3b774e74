"""
Username Directory Service
Registration, availability checks, fallback suggestions and attempt analytics
"""
from typing import Dict, List, Optional

from ..constants import ServiceConstants, SuggestionConstants
from ..decorators import log_operation
from ..exceptions import EmptyCounterError, InvalidArgumentError
from ..logger import directory_logger as logger
from ..models import AttemptCounter, MostAttemptedReport, Registry
from ..validation_utils import require_identifier, require_identifiers


class UsernameDirectory:
    """
    In-memory directory of taken usernames.
    
    Safe to share between threads. Registration is atomic per username and
    attempt counts never lose updates, but there is no atomicity across the
    registry and the counter: a check racing with a registration of the same
    username may observe either order.
    """
    
    def __init__(self, numeric_suffix_limit: int = SuggestionConstants.NUMERIC_SUFFIX_END):
        """
        Args:
            numeric_suffix_limit: Highest numeric suffix tried by
                suggest_alternatives. Only set explicitly by the caller;
                it is never read from the environment.
        """
        if isinstance(numeric_suffix_limit, bool) or not isinstance(numeric_suffix_limit, int) \
                or numeric_suffix_limit < SuggestionConstants.NUMERIC_SUFFIX_START:
            raise InvalidArgumentError(
                f"numeric_suffix_limit must be an integer of at least {SuggestionConstants.NUMERIC_SUFFIX_START}",
                field='numeric_suffix_limit',
                value=numeric_suffix_limit
            )
        
        self.numeric_suffix_limit = numeric_suffix_limit
        self._registry = Registry()
        self._attempts = AttemptCounter()
    
    def register_username(self, username: str, user_id: str) -> bool:
        """
        Claim a username for a user
        
        Args:
            username: Username to claim, used verbatim
            user_id: Identifier of the owning user
            
        Returns:
            True if the username was free and is now owned by user_id,
            False if it was already taken (the existing owner is kept)
            
        Raises:
            InvalidArgumentError: If username or user_id is missing or empty
        """
        require_identifiers(username=username, user_id=user_id)
        
        registered = self._registry.insert_if_absent(username, user_id)
        
        if registered:
            logger.log_service_operation(
                'register_username',
                entity_type=ServiceConstants.USERNAME,
                entity_id=username,
                user_id=user_id
            )
        else:
            logger.info(
                "Username already registered",
                username=username,
                rejected_user_id=user_id
            )
        
        return registered
    
    @log_operation('check_availability', subject_field='username')
    def check_availability(self, username: str) -> bool:
        """
        Check whether a username is free, recording the attempt
        
        Every call counts towards the username's attempt total, whatever
        the outcome and whoever the caller is.
        """
        require_identifier(username, 'username')
        
        self._attempts.increment(username)
        return not self._registry.contains(username)
    
    @log_operation('suggest_alternatives', subject_field='username')
    def suggest_alternatives(self, username: str) -> List[str]:
        """
        Suggest available usernames for a requested one
        
        If the username itself is free the result is just [username].
        Otherwise numeric suffixes are tried in increasing order, followed by
        the variant with every underscore replaced by a dot (only when the
        username contains an underscore). Each candidate goes through
        check_availability and therefore counts as an attempt.
        
        Returns:
            Available candidates in the order they were tried, possibly empty
        """
        require_identifier(username, 'username')
        
        if self.check_availability(username):
            return [username]
        
        suggestions = []
        
        # Strategy 1: append numbers
        for suffix in range(SuggestionConstants.NUMERIC_SUFFIX_START, self.numeric_suffix_limit + 1):
            candidate = f"{username}{suffix}"
            if self.check_availability(candidate):
                suggestions.append(candidate)
        
        # Strategy 2: replace underscore with dot
        if SuggestionConstants.UNDERSCORE in username:
            candidate = username.replace(SuggestionConstants.UNDERSCORE, SuggestionConstants.DOT)
            if self.check_availability(candidate):
                suggestions.append(candidate)
        
        logger.info(
            "Generated username suggestions",
            username=username,
            suggestion_count=len(suggestions)
        )
        
        return suggestions
    
    def get_most_attempted_report(self) -> MostAttemptedReport:
        """
        Most frequently checked username and its count
        
        Raises:
            EmptyCounterError: If no availability check has happened yet
        """
        report = self._attempts.most_attempted()
        
        if report is None:
            logger.warning("Most attempted username requested before any check")
            raise EmptyCounterError()
        
        return report
    
    def get_most_attempted(self) -> str:
        """
        Most frequently checked username as '<username> (<count> attempts)'
        
        Raises:
            EmptyCounterError: If no availability check has happened yet
        """
        return self.get_most_attempted_report().format()
    
    def get_user_id(self, username: str) -> Optional[str]:
        """Owner of a username, or None. Does not count as an attempt."""
        require_identifier(username, 'username')
        return self._registry.get(username)
    
    def is_registered(self, username: str) -> bool:
        """Registry membership without recording an attempt"""
        require_identifier(username, 'username')
        return self._registry.contains(username)
    
    def get_attempt_count(self, username: str) -> int:
        require_identifier(username, 'username')
        return self._attempts.get(username)
    
    def get_attempt_counts(self) -> Dict[str, int]:
        return self._attempts.snapshot()
    
    @property
    def registered_count(self) -> int:
        return len(self._registry)
    
    @property
    def tracked_count(self) -> int:
        return len(self._attempts)
