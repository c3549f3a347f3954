# Sample GraphQL queries for testing

QUERY_GET_BOOK = """
query GetBook($id: Int) {
  book(id: $id) {
    id
    name
    authorId
    author {
      id
      name
    }
  }
}
"""

QUERY_LIST_BOOKS = """
query ListBooks {
  books {
    id
    name
    authorId
  }
}
"""

QUERY_GET_AUTHOR = """
query GetAuthor($id: Int) {
  author(id: $id) {
    id
    name
    books {
      id
      name
    }
  }
}
"""

QUERY_LIST_AUTHORS = """
query ListAuthors {
  authors {
    id
    name
  }
}
"""

MUTATION_ADD_BOOK = """
mutation AddBook($name: String!, $authorId: Int!) {
  addBook(name: $name, authorId: $authorId) {
    id
    name
    authorId
    author {
      name
    }
  }
}
"""

MUTATION_ADD_AUTHOR = """
mutation AddAuthor($name: String!) {
  addAuthor(name: $name) {
    id
    name
    books {
      id
    }
  }
}
"""

MUTATION_UPDATE_AUTHOR = """
mutation UpdateAuthor($id: Int!, $name: String!) {
  updateAuthor(id: $id, name: $name) {
    id
    name
  }
}
"""
