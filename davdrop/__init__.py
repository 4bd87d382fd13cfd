"""davdrop - upload dropped files to WebDAV and link them from markdown notes."""
