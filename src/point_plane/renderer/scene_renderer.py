"""
Renderer for the plane quad and the point.
"""

import slangpy as spy
from pyglm import glm

from point_plane.model.scene import Scene
from point_plane.model.mesh import Mesh, Topology


# xyz position followed by rgba color, all float32.
VERTEX_STRIDE = 28

TOPOLOGIES = {
    Topology.TRIANGLE_LIST: spy.PrimitiveTopology.triangle_list,
    Topology.POINT_LIST: spy.PrimitiveTopology.point_list,
}


class SceneRenderer:
    """Renderer for flat colored meshes."""

    _device: spy.Device
    _render_target: spy.Texture
    _depth_target: spy.Texture

    def __init__(self, device: spy.Device, render_target: spy.Texture) -> None:
        self._device = device
        self._render_target = render_target
        self._depth_target = self._create_depth_target(render_target)

        self._input_layout = self._device.create_input_layout(
            input_elements=[
                {
                    "semantic_name": "POSITION",
                    "semantic_index": 0,
                    "format": spy.Format.rgb32_float,
                },
                {
                    "semantic_name": "COLOR",
                    "semantic_index": 0,
                    "format": spy.Format.rgba32_float,
                    "offset": 12,
                },
            ],
            vertex_streams=[{"stride": VERTEX_STRIDE}],
        )
        self._program = self._device.load_program(
            "gui/flat_color.slang", ["vertexMain", "fragmentMain"]
        )
        self._pipelines = {
            topology: self._device.create_render_pipeline(
                program=self._program,
                input_layout=self._input_layout,
                primitive_topology=primitive_topology,
                targets=[
                    {
                        "format": spy.Format.rgba8_unorm,
                    }
                ],
                depth_stencil={
                    "depth_test_enable": True,
                    "depth_write_enable": True,
                    "format": spy.Format.d32_float_s8_uint,
                    "depth_func": spy.ComparisonFunc.less,
                },
            )
            for topology, primitive_topology in TOPOLOGIES.items()
        }

    def _create_depth_target(self, render_target: spy.Texture) -> spy.Texture:
        return self._device.create_texture(
            type=spy.TextureType.texture_2d,
            format=spy.Format.d32_float_s8_uint,
            width=render_target.width,
            height=render_target.height,
            usage=spy.TextureUsage.depth_stencil,
        )

    def update_render_target(self, render_target: spy.Texture) -> None:
        """Update the render target texture."""

        self._render_target = render_target
        self._depth_target = self._create_depth_target(render_target)

    def clear(self) -> None:
        """Clear the color target to black and the depth target to the far plane."""
        command_encoder = self._device.create_command_encoder()
        with command_encoder.begin_render_pass(
            {
                "color_attachments": [
                    {
                        "view": self._render_target.create_view({}),
                        "load_op": spy.LoadOp.clear,
                        "clear_value": (0.0, 0.0, 0.0, 1.0),
                        "store_op": spy.StoreOp.store,
                    }
                ]
            }
        ):
            pass
        command_encoder.clear_texture_depth_stencil(
            texture=self._depth_target,
            clear_depth=True,
            depth_value=1.0,
        )
        self._device.submit_command_buffer(command_encoder.finish())

    def render_mesh(
        self,
        mesh: Mesh,
        hue: glm.mat4,
        view_mat: glm.mat4,
        proj_mat: glm.mat4,
    ) -> None:
        vertex_data = mesh.vertex_data(hue)
        if vertex_data.shape[0] == 0:
            return

        vbo = self._device.create_buffer(
            usage=spy.BufferUsage.vertex_buffer | spy.BufferUsage.shader_resource,
            label=f"{mesh.name}_vbo",
            data=vertex_data,
        )

        command_encoder = self._device.create_command_encoder()
        with command_encoder.begin_render_pass(
            {
                "color_attachments": [
                    {
                        "view": self._render_target.create_view({}),
                        "load_op": spy.LoadOp.load,
                        "store_op": spy.StoreOp.store,
                    }
                ],
                "depth_stencil_attachment": {
                    "view": self._depth_target.create_view({}),
                    "depth_load_op": spy.LoadOp.load,
                    "depth_store_op": spy.StoreOp.store,
                },
            }
        ) as pass_encoder:
            root = pass_encoder.bind_pipeline(self._pipelines[mesh.topology])
            root_cursor = spy.ShaderCursor(root)
            root_cursor["uniforms"]["modelMatrix"].write(mesh.get_transform_matrix())
            root_cursor["uniforms"]["viewMatrix"].write(view_mat)
            root_cursor["uniforms"]["projMatrix"].write(proj_mat)

            pass_encoder.set_render_state(
                {
                    "viewports": [
                        spy.Viewport.from_size(
                            self._render_target.width, self._render_target.height
                        )
                    ],
                    "scissor_rects": [
                        spy.ScissorRect.from_size(
                            self._render_target.width, self._render_target.height
                        )
                    ],
                    "vertex_buffers": [vbo],
                }
            )
            pass_encoder.draw({"vertex_count": int(vertex_data.shape[0])})
        self._device.submit_command_buffer(command_encoder.finish())

    def render_scene(self, scene: Scene, hue: glm.mat4) -> None:
        """Draw the plane and the point with the given hue.

        :param scene: The scene to draw.
        :param hue: Color matrix for the current collision state.
        """
        w, h = self._render_target.width, self._render_target.height
        view_mat = scene.camera.view_matrix()
        proj_mat = scene.camera.projection_matrix(w, h)
        self.clear()
        for mesh in (scene.plane, scene.point):
            self.render_mesh(mesh, hue=hue, view_mat=view_mat, proj_mat=proj_mat)
