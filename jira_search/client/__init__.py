"""Client for the Jira search API"""

from jira_search.client.jira_client import JiraClient

__all__ = ["JiraClient"]
