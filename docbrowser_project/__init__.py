"""docbrowser_project package

Page-by-page document browser: a navigation controller that keeps a page
bar, a table-of-contents browser and an index search in step with a host
document's current page.  The code lives under :pymod:`docbrowser_project.src`.
"""

__version__ = "0.1.0"
