"""GraphQL documents for the GitHub Projects (V2) API."""


def get_project_query(query_root: str) -> str:
    """Query for a project's node ID under an organization or user root."""
    return f"""
    query getProject($projectOwnerName: String!, $projectNumber: Int!) {{
      {query_root}(login: $projectOwnerName) {{
        projectV2(number: $projectNumber) {{
          id
        }}
      }}
    }}
    """


def list_project_items_query(query_root: str) -> str:
    """Query for one page of a project's items and the content each one links to."""
    return f"""
    query projectItems($projectOwnerName: String!, $projectNumber: Int!, $first: Int!, $after: String) {{
      {query_root}(login: $projectOwnerName) {{
        projectV2(number: $projectNumber) {{
          items(first: $first, after: $after) {{
            totalCount
            pageInfo {{
              hasNextPage
              endCursor
            }}
            nodes {{
              id
              content {{
                ... on Issue {{
                  id
                }}
                ... on PullRequest {{
                  id
                }}
                ... on DraftIssue {{
                  id
                }}
              }}
            }}
          }}
        }}
      }}
    }}
    """


ADD_PROJECT_ITEM_MUTATION = """
mutation addIssueToProject($input: AddProjectV2ItemByIdInput!) {
  addProjectV2ItemById(input: $input) {
    item {
      id
    }
  }
}
"""

DELETE_PROJECT_ITEM_MUTATION = """
mutation removeIssueFromProject($input: DeleteProjectV2ItemInput!) {
  deleteProjectV2Item(input: $input) {
    deletedItemId
  }
}
"""
