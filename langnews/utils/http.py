#!/usr/bin/env python3
"""
HTTP response handling module.

This module contains functions for processing HTTP status codes
and determining appropriate handling strategies.
"""


def handle_response_code(url, response_code):
    """
    Determine if a response code indicates success or failure and provides appropriate handling recommendations.

    Args:
        url: The URL that was accessed
        response_code: The HTTP status code (int or None)

    Returns:
        dict: A dictionary with handling information including:
            - 'success': Boolean indicating if the response is successful
            - 'action': String indicating the recommended action ('process', 'retry', 'skip')
            - 'reason': String explaining the reason for the action
            - 'retry_after': Suggested delay before retry (None if not applicable)
    """
    # Browsers that do not expose the navigation status still loaded a page
    if response_code is None or not isinstance(response_code, int) or response_code == 0:
        return {
            'success': True,
            'action': 'process',
            'reason': "Undetected status code (assuming success)",
            'retry_after': None,
        }

    if 200 <= response_code < 400:
        return {
            'success': True,
            'action': 'process',
            'reason': f"Successful response ({response_code})",
            'retry_after': None,
        }

    elif 400 <= response_code < 500:
        if response_code == 429:
            return {
                'success': False,
                'action': 'retry',
                'reason': "Rate limited (429 Too Many Requests)",
                'retry_after': 60,
            }
        elif response_code in (408, 425):
            return {
                'success': False,
                'action': 'retry',
                'reason': f"Request not completed ({response_code})",
                'retry_after': 10,
            }
        elif response_code == 404:
            return {
                'success': False,
                'action': 'skip',
                'reason': "Page not found (404)",
                'retry_after': None,
            }
        else:
            return {
                'success': False,
                'action': 'skip',
                'reason': f"Client error ({response_code})",
                'retry_after': None,
            }

    elif 500 <= response_code < 600:
        if response_code == 503:
            return {
                'success': False,
                'action': 'retry',
                'reason': "Server overloaded (503 Service Unavailable)",
                'retry_after': 45,
            }
        else:
            return {
                'success': False,
                'action': 'retry',
                'reason': f"Server error ({response_code})",
                'retry_after': 30,
            }

    else:
        return {
            'success': False,
            'action': 'skip',
            'reason': f"Unknown status code ({response_code})",
            'retry_after': None,
        }


def should_retry(response_code, retry_count=0, max_retries=3):
    """
    Determine if a request should be retried based on the response code.

    Args:
        response_code: HTTP status code
        retry_count: Current retry count
        max_retries: Maximum number of retries

    Returns:
        bool: True if the request should be retried, False otherwise
    """
    if retry_count >= max_retries:
        return False

    if response_code is None:
        return False

    # Always retry rate limit responses
    if response_code == 429:
        return True

    # Retry server errors
    if 500 <= response_code < 600:
        return True

    # Request Timeout, Too Early
    if response_code in (408, 425):
        return True

    return False
