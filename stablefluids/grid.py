"""Colored triangle mesh that displays the density field.

Needs a current OpenGL 3.3 core context for everything except construction.
"""

import ctypes
import logging

import numpy as np
from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader

from .mesh import COLOR_OFFSET, build_indices, build_vertices

log = logging.getLogger(__name__)

VERTEX_SHADER = """
#version 330 core
layout (location = 0) in vec3 inPos;
layout (location = 1) in vec3 inColor;
out vec3 fragColor;
void main()
{
    gl_Position = vec4(inPos, 1.0);
    fragColor = inColor;
}
"""

FRAGMENT_SHADER = """
#version 330 core
in vec3 fragColor;
out vec4 outColor;
void main()
{
    outColor = vec4(fragColor, 1.0f);
}
"""


class Grid2D:
    def __init__(self, width, height, size):
        self.num_w = width // size
        self.num_h = height // size
        self.vertices = build_vertices(width, height, size)
        self.indices = build_indices(self.num_w, self.num_h)

        self.program = None
        self.vao = None
        self.vbo = None
        self.ibo = None

    @property
    def size(self):
        return len(self.vertices)

    def create_buffers(self):
        # core profile program validation needs a bound vertex array
        self.vao = glGenVertexArrays(1)
        glBindVertexArray(self.vao)

        self.program = compileProgram(
            compileShader(VERTEX_SHADER, GL_VERTEX_SHADER),
            compileShader(FRAGMENT_SHADER, GL_FRAGMENT_SHADER),
        )

        self.vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
        glBufferData(GL_ARRAY_BUFFER, self.vertices.nbytes, self.vertices, GL_DYNAMIC_DRAW)

        stride = self.vertices.strides[0]
        # position
        glEnableVertexAttribArray(0)
        glVertexAttribPointer(0, 3, GL_FLOAT, GL_FALSE, stride, ctypes.c_void_p(0))
        # color
        glEnableVertexAttribArray(1)
        glVertexAttribPointer(
            1, 3, GL_FLOAT, GL_FALSE, stride, ctypes.c_void_p(COLOR_OFFSET * self.vertices.itemsize)
        )

        self.ibo = glGenBuffers(1)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.ibo)
        glBufferData(GL_ELEMENT_ARRAY_BUFFER, self.indices.nbytes, self.indices, GL_STATIC_DRAW)

        log.debug("Grid buffers created: %d vertices, %d triangles", self.size, len(self.indices) // 3)

    def delete_buffers(self):
        if self.vao is None:
            return
        glDeleteVertexArrays(1, [self.vao])
        glDeleteBuffers(2, [self.vbo, self.ibo])
        glDeleteProgram(self.program)
        self.program = self.vao = self.vbo = self.ibo = None

    def update_color(self, idx, color):
        """Single-vertex grey value; ``update_colors`` writes a whole frame."""
        self.vertices[idx, COLOR_OFFSET:] = color

    def update_colors(self, indices, colors):
        """Grey value per vertex, written into all three color channels."""
        self.vertices[indices, COLOR_OFFSET:] = np.asarray(colors, dtype=np.float32)[:, None]

    def update_buffer(self):
        glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
        glBufferData(GL_ARRAY_BUFFER, self.vertices.nbytes, self.vertices, GL_DYNAMIC_DRAW)

    def render(self):
        glUseProgram(self.program)
        glBindVertexArray(self.vao)
        glDrawElements(GL_TRIANGLES, len(self.indices), GL_UNSIGNED_INT, None)
